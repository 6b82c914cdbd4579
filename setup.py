#!/usr/bin/env python3
from __future__ import annotations

import pathlib
import re
import setuptools
import sys
import toml

__minver__ = '3.8'
__github__ = 'https://github.com/from-posix/from-posix/'
__author__ = 'from-posix contributors'
__slogan__ = 'Convert POSIX shell export statements into Nushell environment assignments.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: System :: Shells',
    'Topic :: Text Processing',
    'Topic :: Utilities',
]


def get_config():
    here = pathlib.Path(__file__).parent.absolute()
    sys.path.insert(0, str(here))

    import fromposix

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = here.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            def complete_link(match):
                return F'({__github__}blob/master/{match[1]})'
            readme = README.read()
            return re.sub(R'(?<=\])\((?!\w+://)(.*?)\)', complete_link, readme)

    ppcfg: dict[str, dict] = toml.load(here.joinpath('pyproject.toml'))
    project = ppcfg['tool']['fromposix']

    return dict(
        name=fromposix.__distribution__,
        version=fromposix.__version__,
        long_description=get_setup_readme(),
        long_description_content_type='text/markdown',
        author=__author__,
        description=__slogan__,
        url=__github__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('fromposix*',)),
        install_requires=project['requires'],
        extras_require=project['extras'],
        entry_points={'console_scripts': ['from-posix=fromposix.cli:run']},
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())
