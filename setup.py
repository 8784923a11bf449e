# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

from setuptools import find_packages, setup


def write_version():
    import subprocess
    try:
        p = subprocess.Popen(["git", "describe", "--dirty", "--tags",
                              "--always"],
                             stdout=subprocess.PIPE, stderr=subprocess.DEVNULL)
        res = p.communicate()[0].strip().decode('utf-8')
    except OSError:
        res = ""
    with open("localmin/git_version.py", "w") as file:
        file.write('gitversion = "{}"\n'.format(res or "unknown"))


write_version()
exec(open('localmin/version.py').read())

setup(name="localmin",
      version=__version__,
      description="Brent's local minimization with reverse communication",
      packages=find_packages(include=["localmin", "localmin.*"]),
      zip_safe=True,
      license="GPLv3",
      install_requires=['numpy', 'scipy>=1.4.1'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.6',
      classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: GNU General Public License v3 "
        "or later (GPLv3+)"],
      )
