from setuptools import setup, find_packages
import qrepl

setup(
  name              = "qrepl",
  url               = "https://github.com/obfusk/qrepl",
  description       = "interactive interpreter front end w/ multi-line statement detection",
  version           = qrepl.__version__,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development :: Interpreters",
  ],
  keywords          = "repl interpreter readline continuation",
  packages          = find_packages(include = ["qrepl"]),
  entry_points      = { "console_scripts": ["qrepl=qrepl:main_"] },
  python_requires   = ">=3.5",
  install_requires  = ["regex"],
  extras_require    = { "test": ["coverage", "pytest"] },
)
