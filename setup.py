from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")
test_requirements = parse_requirements("requirements-test.txt")

setup(
    name='oeq_client',
    version='0.1.0',
    description='Typed async client for the openEQUELLA REST API',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["oeq_client", "oeq_client.*", "oeq_types", "oeq_types.*"]),
)
