from setuptools import setup


LONG_DESC = """
localetags parses locale identifiers, such as 'en-US-u-ca-gregory' or
'de-t-en-h0-hybrid', into their parts and puts them back together in a
canonical form. These are BCP 47 language tags, including their Unicode,
transform, private use and other extensions.

The documentation for localetags lives in the docstrings of its modules.
"""


setup(
    name="localetags",
    version='0.1.0',
    license="MIT",
    platforms=["any"],
    description="Parses and canonicalizes BCP 47 locale identifiers and their extensions",
    long_description=LONG_DESC,
    packages=['localetags', 'localetags.extensions'],
    include_package_data=True,
    install_requires=[],
    python_requires='>=3.7',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest']
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
