from setuptools import setup, find_packages

setup(
    name="pdf-parsing-service",
    version="0.1.0",
    description="Stateless microservice that downloads a PDF by URL and returns its text layer",
    packages=find_packages(exclude=["tests*"]),
    install_requires=[
        "PyMuPDF>=1.23.0",
        "pdfplumber>=0.10.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "click>=8.1.0",
        "httpx>=0.25.0",
        "structlog>=23.0.0",
        "fastapi>=0.104.0",
        "uvicorn>=0.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "mypy>=1.5.0",
            "black>=23.7.0",
            "flake8>=6.0.0",
            "isort>=5.12.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "pdf-service=pdf_service.cli:cli",
        ]
    },
    python_requires=">=3.9",
)
