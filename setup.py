import os.path
from setuptools import setup, find_packages


DISTNAME = 'histo-breaks'
DESCRIPTION = "One-dimensional histograms with Scott breaks balanced to a range"
LONG_DESCRIPTION = open(os.path.join(os.path.dirname(__file__), 'README.rst')).read()
MAINTAINER = 'Histo Breaks Developers'
MAINTAINER_EMAIL = ''
LICENSE = 'MPL-2.0'
VERSION = '1.0.0'

setup(
    name=DISTNAME,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    description=DESCRIPTION,
    license=LICENSE,
    version=VERSION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/x-rst',
    packages=find_packages(),
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Scientific/Engineering',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX',
        'Operating System :: Unix',
        'Operating System :: MacOS'
    ],
    python_requires='>=3.8',
    install_requires=['numpy', 'scipy', 'matplotlib'],
    extras_require={
        'tests': ['pytest'],
    },
)
