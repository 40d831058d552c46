"""Shared fixtures: a small synthetic TAGNT export."""

import pytest

from tagnt_tr.importer import run_import
from tagnt_tr.source import VerseStore

SAMPLE_TAGNT = """\
TAGNT Mat-Jhn - Translators Amalgamated Greek NT - STEPBible.org CC BY
(This is saved as 2  files because of size)
=================================
Introduction & Abbreviations at: https://github.com/STEPBible
\tData created by www.STEPBible.org
# Jhn.1.1\tἘν ἀρχῇ ἦν ὁ λόγος
Word & Type\tGreek\tEnglish translation\tdStrongs = Grammar\tDictionary form =  Gloss\teditions
Jhn.1.1#01=NKO\tἘν (En)\tIn\tG1722=PREP\tἐν=in\tNA28+TR
Jhn.1.1#02=NKO\tἀρχῇ (archē)\t[the] beginning\tG0746=N-DSF\tἀρχή=beginning\tNA28+TR
Jhn.1.1#03=NKO\tἦν (ēn)\twas\tG1510=V-IAI-3S\tεἰμί=to be\tNA28+TR
Jhn.1.1#04=NKO\tὁ (ho)\tthe\tG3588=T-NSM\tὁ=the\tNA28+TR
Jhn.1.1#05=NKO\tλόγος, (logos)\tWord\tG3056=N-NSM\tλόγος=word\tNA28+TR
Jhn.1.1#06=NO\tκαὶ (kai)\tand\tG2532=CONJ\tκαί=and\tNA28

Jhn.7.53{8.1}#01=K(O)\tἸησοῦς (Iēsous)\tJesus\tG2424G=N-NSM-P\tἸησοῦς=Jesus\tTR
Php.1.16[1.17]#01=NKO\tοἱ (hoi)\tthe [ones]\tG3588=T-NPM\tὁ=the\tNA28+TR
Php.1.16[1.17]#02=NO\tμὲν (men)\tindeed\tG3303=PRT\tμέν=on the one hand\tNA28
Xyz.1.1#01=NKO\tλόγος (logos)\tWord\tG3056=N-NSM\tλόγος=word\tTR
Jhn.1.2#01=NKO\t (houtos)\tHe\tG3778=D-NSM\tοὗτος=this\tTR
Jhn.1.2#xx=NKO\tοὗτος (houtos)\tHe\tG3778=D-NSM\tοὗτος=this\tTR
"""


@pytest.fixture
def sample_lines():
    return SAMPLE_TAGNT.splitlines(keepends=True)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "TAGNT-Mat-Jhn.txt"
    path.write_text(SAMPLE_TAGNT, encoding="utf-8")
    return path


@pytest.fixture
def store(tmp_path, sample_file):
    """Verse store populated from the sample export."""
    store = VerseStore(tmp_path / "data")
    run_import([sample_file], store)
    return store
