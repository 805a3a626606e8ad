from setuptools import setup, find_packages

setup(
    name="radkin",
    version="0.1.0",
    description="Relativistic kinematics kernel for radiation spectrum simulations",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy",
        "scipy",
        "pyyaml",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
