# Copyright (c) "civiltime" contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import pathlib
from importlib.util import (
    module_from_spec,
    spec_from_file_location,
)

from setuptools import (
    find_packages,
    setup,
)


# load _meta on its own, importing the package would need its dependencies
_meta_spec = spec_from_file_location(
    "_meta", pathlib.Path(__file__).parent / "src" / "civiltime" / "_meta.py"
)
_meta = module_from_spec(_meta_spec)
_meta_spec.loader.exec_module(_meta)
package = _meta.package
version = _meta.version


setup(
    name=package,
    version=version,
    description="Civil date, time and time zone arithmetic",
    long_description=(
        "Instants, civil dates and times, durations, periods and time "
        "zones with exact calendar arithmetic."
    ),
    license="Apache License, Version 2.0",
    python_requires=">=3.7",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "pytz",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
        "typing": [
            "typing_extensions",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
)
