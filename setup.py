"""Setup file for the package."""

from setuptools import setup, find_packages

setup(
    name="sign-library",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
        "supabase>=2.0.0",
        "numpy>=1.24.0",
        "Pillow>=9.1.0",
        "scikit-learn>=1.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'sign-library=sign_library.main:main',
        ],
    },
    description="Bulk image ingestion and color-coded naming for the road-sign icon library",
    python_requires='>=3.9',
)
