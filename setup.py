from setuptools import setup

setup(
    name='basecoder',
    version='1.0',
    description='Lossless conversion between byte sequences and positional-base digit strings.',
    python_requires='>=3.10',
    py_modules=['app', 'config', 'core_logic', 'encoding', 'models', 'mymath', 'router'],
    install_requires=[
        'fastapi>=0.100',
        'pydantic>=2.0',
        'slowapi>=0.1.9',
        'uvicorn',
    ],
    extras_require={
        'test': ['pytest', 'httpx'],
    },
)
