import pathlib
import setuptools


def parse_reqs(filename):
  requirements = pathlib.Path(filename)
  requirements = requirements.read_text().split('\n')
  requirements = [x for x in requirements if x.strip()]
  return requirements


setuptools.setup(
    name='wrr',
    version='1.0.0',
    description='Weighted round-robin selection over keyed, weighted entries',
    long_description=pathlib.Path('README.md').read_text(),
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['wrr', 'wrr.*']),
    package_data={'wrr': ['configs.yaml']},
    include_package_data=True,
    install_requires=parse_reqs('requirements.txt'),
    extras_require={'test': ['pytest']},
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Networking',
    ],
)
