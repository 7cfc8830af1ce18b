from setuptools import setup, find_packages

long_description = 'Hardware summary tool for Apple Silicon'

setup(
    name='socinfo',
    version='0.1.0',
    author='Timothy Liu, binlecode',
    author_email='tlkh.xms@gmail.com, bin.le.code@gmail.com',
    url='https://github.com/binlecode/socinfo',
    description='Hardware summary tool for Apple Silicon',
    long_description=long_description,
    long_description_content_type="text/markdown",
    license='MIT',
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
            'console_scripts': [
                'socinfo = socinfo.socinfo:cli',
            ]
    },
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: MacOS",
    ),
    keywords='socinfo apple-silicon sysctl system_profiler',
    python_requires=">=3.8",
    install_requires=[
        "psutil",
    ],
    extras_require={
        "dev": [
            "ruff",
        ],
        "test": [
            "pytest",
        ],
    },
    zip_safe=False
)
