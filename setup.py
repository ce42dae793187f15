from setuptools import setup, find_namespace_packages

with open("requirements.txt") as f:
    install_reqs = f.read().strip().split("\n")

setup(
    name='uiccapdu',
    version='0.1.0',
    license='MIT license',
    description = 'command APDU encoder for UICC / SIM cards (ISO/IEC 7816-4, ETSI TS 102 221)',
    long_description="command APDU encoder for UICC / SIM cards - class byte coding, instruction/class compatibility checks and short APDU serialization",
    packages=find_namespace_packages("src", include=["*"]),
    package_dir={"": "src"},
    install_requires=install_reqs,
    extras_require={"test": ["pytest", "pytest-mock"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
