import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="photon-attenuation",
    version="0.1.0",
    description="Photon mass attenuation coefficients of elements and materials, 1-300 keV.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["photon_attenuation", "photon_attenuation.*"]),
    install_requires=[
        "numpy",
        "scipy",
        "rich",
    ],
    extras_require={
        "dev": [
            "black",
            "pytest",
        ],
    },
    include_package_data=True,
    python_requires=">=3.8",
)
