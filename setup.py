from setuptools import setup, find_packages

setup(
    name='lark-interpreter',
    version='0.1.0',
    description='Lark language tree-walking interpreter',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'lk = larklang.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
