import os
from setuptools import setup
from src.thumbscache import version

# Utility function to read the ReadMe.md file...
#   Used for the long_description.  It's nice, because now:
#     1) we have a top level ReadMe.md file and
#     2) it's easier to type in the ReadMe.md file than to put a raw string in below
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
  # METADATA...
  name = 'thumbscache',
  version = version.STR_VERSION,
  author = version.author[0],
  author_email = version.author[1],
  maintainer = version.maintainer[0][0],
  maintainer_email = version.maintainer[0][1],
  description = 'Thumbscache: The Windows Thumbnail Cache Decoder',
  license = 'GNU GPLv3',
  long_description = read('ReadMe.md'),
  long_description_content_type = 'text/markdown',
  platforms = ['LINUX', 'MAC', 'WINDOWS'],
  python_requires = '>=3.6',
  # OPTIONS...
  entry_points = {'console_scripts': ['thumbscache=thumbscache.thumbscache:main']},
  packages = ['thumbscache'],
  package_dir = {'thumbscache': 'src/thumbscache'},
  extras_require = {'test': ['pytest']},
)
