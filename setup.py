from setuptools import setup, find_packages

setup(
    name="storeqa",
    version="0.0.1",
    packages=find_packages(exclude=["tests", "tests.*", "performance"]),
    include_package_data=True,
    package_data={"storeqa": ["ui/data/*.json", "reporting/templates/*.j2"]},
    install_requires=[
        "playwright>=1.52.0",
        "pydantic",
        "openai",
        "httpx",
        "python-dotenv",
        "requests",
        "jinja2",
        "locust",
        "pytest",
        "pytest-asyncio",
    ],
    python_requires='>=3.10',
)
