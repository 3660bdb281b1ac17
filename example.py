import localetags

# Parse some locale identifiers with extensions, and show:
#
# - The original tag
# - The tag in canonical form
# - Its Unicode extension on its own

TAGS = [
    'en-US-u-ca-gregory',
    'DE_de-U-CO-Phonebk-KA-Shifted',
    'ja-u-ca-japanese-t-it-x-private',
    'und-Cyrl-t-und-latn-m0-ungegn-2007',
    'th-TH-u-nu-thai-b-foo',
]

for tag in TAGS:
    locale = localetags.get(tag)
    unicode_ext = locale.get_extensions().get_unicode()
    print('%-36s %-36s %s' % (tag, locale, unicode_ext))
