import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pymathfn",
    version="0.1.0",
    description="Sampled grid interpolation, small dense matrices and "
                "PDF-style mathematical functions.",
    include_package_data=True,
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'test': ['pytest']
    },
    keywords='interpolation matrix determinant inverse sampled function',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pymathfn', 'pymathfn.*']),
    python_requires='>=3.13',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
