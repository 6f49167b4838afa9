import re

import setuptools

with open('lina/_version.py') as f:
    version = re.search(r"__version__ = '([^']+)'", f.read()).group(1)

setuptools.setup(
    name='lina',
    version=version,
    packages=['lina'],
    python_requires='>=3.8.0',
    install_requires=['sortedcontainers'],
    extras_require={'test': ['pytest']},
    include_package_data=True,
    data_files=[
        ('', ['README.md', 'CHANGELOG.md']),
    ],
)
