from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")
test_requirements = parse_requirements("requirements-test.txt")

setup(
    name='kibana-client',
    version='0.1.0',
    description='Typed client for the Kibana spaces and role management API',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "kibana-client=kibana_client.cli:main",
        ],
    }
)
