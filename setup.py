#!/usr/bin/env python

from setuptools import setup, find_packages


description = 'Falcon ASGI endpoint for raw image uploads and listings.'

requirements = [
    'falcon>=3.0.0',
    'aiofiles>=0.4.0',
    'Jinja2>=2.10',
]

extras_require = {
    'dev': [
        'httpie',
        'uvicorn>=0.11.0',
    ],
    'test': [
        'Pillow>=6.0.0',
        'pytest',
    ],
}

setup(
    name='imgdrop',
    version='0.1.0dev0',
    description=description,
    long_description=description,
    license='Apache v2',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
    ],
    keywords='falcon asgi upload images scrup uvicorn',
    packages=find_packages(exclude=['contrib', 'docs', 'test*']),
    python_requires='>=3.7',
    install_requires=requirements,
    extras_require=extras_require,
    package_data={'imgdrop': ['templates/*.html']},
    data_files=[],
)
