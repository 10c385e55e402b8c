# Copyright 2019-2024 Xanadu Quantum Technologies Inc.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from setuptools import setup, find_packages


with open("gausscv/_version.py") as f:
    version = f.readlines()[-1].split()[-1].strip("\"'")


requirements = [
    "numpy>=1.17.4",
    "scipy>=1.0.0",
    "thewalrus>=0.19.0",
    "toml",
    "appdirs",
]

extra_requirements = {
    "test": ["pytest>=6.0"],
}

info = {
    "name": "GaussCV",
    "version": version,
    "maintainer": "Xanadu Inc.",
    "maintainer_email": "software@xanadu.ai",
    "license": "Apache License 2.0",
    "packages": find_packages(where=".", include=["gausscv", "gausscv.*"]),
    "description": "Gaussian states, unitaries and channels of continuous-variable systems",
    "long_description": open("README.rst", encoding="utf-8").read(),
    "long_description_content_type": "text/x-rst",
    "provides": ["gausscv"],
    "install_requires": requirements,
    "extras_require": extra_requirements,
    "python_requires": ">=3.8",
}

classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "License :: OSI Approved :: Apache Software License",
    "Natural Language :: English",
    "Operating System :: POSIX",
    "Operating System :: MacOS :: MacOS X",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Topic :: Scientific/Engineering :: Physics",
]

setup(classifiers=classifiers, **(info))
