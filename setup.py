from os import path
import setuptools

from pgdumpsplit import __version__


def read_requirements(name):
    requirements = []
    try:
        with open(path.join('requires', name)) as req_file:
            for line in req_file:
                if '#' in line:
                    line = line[:line.index('#')]
                line = line.strip()
                if line.startswith('-r'):
                    requirements.extend(read_requirements(line[2:].strip()))
                elif line and not line.startswith('-'):
                    requirements.append(line)
    except IOError:
        pass
    return requirements


setuptools.setup(
    name='pgdumpsplit',
    version=__version__,
    description='Split plain-text PostgreSQL pg_dump files into one file '
                'per database object',
    long_description=open('README.rst').read(),
    license='BSD',
    packages=['pgdumpsplit'],
    package_data={'': ['LICENSE', 'README.rst']},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=read_requirements('installation.txt'),
    extras_require={'testing': read_requirements('testing.txt')},
    entry_points={
        'console_scripts': ['pgdumpsplit=pgdumpsplit.cli:main']},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Database',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules'],
    zip_safe=True)
