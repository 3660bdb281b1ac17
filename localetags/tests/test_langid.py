import pytest

from localetags import LanguageIdentifier, InvalidLanguage, InvalidSubtag


@pytest.mark.parametrize('tag, expected', [
    ('en', 'en'),
    ('EN-us', 'en-US'),
    ('zh_hant_tw', 'zh-Hant-TW'),
    ('es-419', 'es-419'),
    ('und', 'und'),
    ('und-Latn', 'und-Latn'),
    ('de-DE-1996-1901', 'de-DE-1901-1996'),
    ('sl-rozaj-rozaj', 'sl-rozaj'),
    ('xxxx', 'xxxx'),
])
def test_canonical_form(tag, expected):
    assert str(LanguageIdentifier.parse(tag)) == expected


@pytest.mark.parametrize('tag, error', [
    ('e', InvalidLanguage),
    ('123', InvalidLanguage),
    ('en-latn-latn', InvalidSubtag),
    ('en-us-latn', InvalidSubtag),
    ('en-a1', InvalidSubtag),
    ('en-fonipa-us', InvalidSubtag),
    ('en-u-ca-gregory', InvalidSubtag),
])
def test_invalid(tag, error):
    with pytest.raises(error):
        LanguageIdentifier.parse(tag)


def test_from_parts():
    langid = LanguageIdentifier.from_parts('FR', 'latn', 'ca', ['1694acad'])
    assert langid.get_language() == 'fr'
    assert langid.get_script() == 'Latn'
    assert langid.get_region() == 'CA'
    assert langid.get_variants() == ['1694acad']
    assert str(langid) == 'fr-Latn-CA-1694acad'

    with pytest.raises(InvalidLanguage):
        LanguageIdentifier.from_parts('f')
    with pytest.raises(InvalidSubtag):
        LanguageIdentifier.from_parts('fr', variants=['ab'])


def test_raw_parts():
    langid = LanguageIdentifier.parse('ca-ES-valencia')
    raw = langid.to_raw_parts()
    assert raw == ('ca', None, 'ES', ('valencia',))
    assert LanguageIdentifier.from_raw_parts_unchecked(*raw) == langid


def test_setters():
    langid = LanguageIdentifier.parse('en-US')
    langid.set_language('und')
    assert langid.language is None
    assert str(langid) == 'und-US'
    langid.set_region(None)
    langid.set_script('cyrl')
    assert str(langid) == 'und-Cyrl'
    with pytest.raises(InvalidSubtag):
        langid.set_script('cy')


def test_matches():
    en = LanguageIdentifier.parse('en')
    en_gb = LanguageIdentifier.parse('en-GB')
    fr = LanguageIdentifier.parse('fr')
    und = LanguageIdentifier.parse('und')

    assert en.matches(en)
    assert not en.matches(en_gb)
    assert en.matches(en_gb, self_as_range=True)
    assert en_gb.matches(en, other_as_range=True)
    assert not en_gb.matches(en, self_as_range=True)
    assert not en.matches(fr, True, True)
    assert und.matches(fr, self_as_range=True)

    variant = LanguageIdentifier.parse('de-1901')
    assert not variant.matches(LanguageIdentifier.parse('de'))
    assert variant.matches(LanguageIdentifier.parse('de'), other_as_range=True)
