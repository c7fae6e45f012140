from setuptools import setup, find_packages

setup(
    name='GeoPairDistance',
    version='0.1',
    packages=find_packages(include=['geopair_engine', 'geopair_app']),
    python_requires='>=3.10',
    install_requires=[
        'pandas<3',
        'numpy',
        'python-dotenv'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    entry_points={
        'console_scripts': [
            'geopair=geopair_app.run:main'
        ]
    }
)
