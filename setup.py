from setuptools import setup, find_namespace_packages

setup(
    name="nearbyindia",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["nearbyindia*"]),
    install_requires=[
        "boto3>=1.28.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "moto>=5.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "pydantic-to-typescript>=2.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "nearbyindia-sample-data=nearbyindia.tools.generate_sample_data:main",
        ]
    },
    python_requires=">=3.11",
)
