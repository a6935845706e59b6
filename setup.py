# -*- coding: utf-8 -*-

import setuptools
import os

# for some reason os gets munged after this point on Windows, so compute it here.
readme_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.md")

setuptools.setup(
    name="nionflex",
    version="0.1.0",
    author="Nion Software",
    author_email="swift@nion.com",
    description="Visibility aware single axis flex layout for cell based user interfaces.",
    long_description=open(readme_path).read(),
    long_description_content_type="text/markdown",
    url="https://github.com/nion-software/nionflex",
    packages=["nion.flex", "nion.flex.test"],
    install_requires=['numpy', 'nionutils>=0.3.19'],
    license='Apache 2.0',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires='>=3.10',
    test_suite="nion.flex.test",
)
