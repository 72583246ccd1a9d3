from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="incgamma",
    version="0.1.0",
    author="David Beery",
    author_email="shakesbeery@gmail.com",
    description="Gamma and regularized incomplete gamma functions in double precision",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.7",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "scipy",
            "sympy",
        ],
    },
    include_package_data=True,
)
