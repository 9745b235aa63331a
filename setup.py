import setuptools


with open("README.md", "r") as readme_file:
    readme = readme_file.read()

setuptools.setup(
    name="barlabel",
    version="0.8.0",
    description="Batch PDF label generator with Code128, EAN-13, UPC-A "
                "and QR codes",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "reportlab",
        "qrcode",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "barlabel=barlabel.cli:main",
            "barlabel-barcode=barlabel.cli:barcode_main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.6"
)
