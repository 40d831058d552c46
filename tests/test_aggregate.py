"""Tests for verse aggregation."""

from tagnt_tr.aggregate import aggregate, build_verse, join_words
from tagnt_tr.models import ParsedWord
from tagnt_tr.tagnt import parse_tagnt_lines


def make_word(word_num: int, greek: str, **kwargs) -> ParsedWord:
    return ParsedWord(
        book="John",
        chapter=1,
        verse=1,
        word_num=word_num,
        type="NKO",
        greek=greek,
        **kwargs,
    )


class TestJoinWords:
    def test_single_spaces(self):
        assert join_words(["Ἐν", "ἀρχῇ", "ἦν"]) == "Ἐν ἀρχῇ ἦν"

    def test_collapses_space_before_punctuation(self):
        texts = ["λόγος", ",", "θεόν", ".", "ἦν", ";", "a", ":", "b", "!", "c", "?", "d", "·"]
        assert join_words(texts) == "λόγος, θεόν. ἦν; a: b! c? d·"

    def test_empty(self):
        assert join_words([]) == ""


class TestBuildVerse:
    def test_sorted_and_renumbered(self):
        # word 2 was filtered out upstream; input order is scrambled
        words = [make_word(3, "ἦν"), make_word(1, "Ἐν"), make_word(4, "ὁ")]
        verse = build_verse(words)
        assert [w.text for w in verse.words] == ["Ἐν", "ἦν", "ὁ"]
        assert [w.position for w in verse.words] == [1, 2, 3]
        assert verse.text == "Ἐν ἦν ὁ"

    def test_word_fields(self):
        verse = build_verse(
            [make_word(1, "ἀρχῇ", strongs="G746", morph="N-DSF", translation="beginning")]
        )
        word = verse.words[0]
        assert word.lemma == ["G746"]
        assert word.strongs == "G746"
        assert word.morph == "robinson:N-DSF"
        assert word.translation == "beginning"
        assert word.metadata == {}
        assert word.gematria.standard == 719

    def test_missing_fields_become_null(self):
        word = build_verse([make_word(1, "Ἐν")]).words[0]
        assert word.lemma is None
        assert word.strongs is None
        assert word.morph is None
        assert word.translation is None

    def test_gematria_is_sum_of_words(self):
        verse = build_verse([make_word(1, "λόγος"), make_word(2, "τῷ")])
        for field in ("standard", "ordinal", "reduced"):
            assert getattr(verse.gematria, field) == sum(
                getattr(w.gematria, field) for w in verse.words
            )
        assert verse.gematria.standard == 373 + 1110


class TestAggregate:
    def test_sample_corpus(self, sample_lines):
        verses = aggregate(parse_tagnt_lines(sample_lines))
        john = verses[("John", 1, 1)]
        assert john.text == "Ἐν ἀρχῇ ἦν ὁ λόγος,"
        # Ἐν 55 + ἀρχῇ 719 + ἦν 58 + ὁ 70 + λόγος 373
        assert john.gematria.standard == 1275
        assert verses[("John", 8, 1)].text == "Ἰησοῦς"
        assert verses[("Phil", 1, 17)].text == "οἱ"

    def test_every_verse_sums_its_words(self, sample_lines):
        for verse in aggregate(parse_tagnt_lines(sample_lines)).values():
            for field in ("standard", "ordinal", "reduced"):
                assert getattr(verse.gematria, field) == sum(
                    getattr(w.gematria, field) for w in verse.words
                )
