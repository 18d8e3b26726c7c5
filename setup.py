import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pyroots",
    version="0.1.0",
    description="Bracketing and polishing root finders for scalar "
                "equations.",
    include_package_data=True,
    install_requires=[
        'numpy', 'sympy'
    ],
    extras_require={
        'test': ['pytest', 'scipy']
    },
    keywords='root finding numerical methods bisection brent newton',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pyroots', 'pyroots.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
