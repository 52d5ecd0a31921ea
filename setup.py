from setuptools import find_packages, setup

package_name = 'frontier_selection'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(include=[package_name, package_name + '.*']),
    package_data={package_name: ['data/*.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'setuptools',
        'numpy',
        'scipy',
        'PyYAML',
    ],
    zip_safe=True,
    maintainer='Drobot Team',
    maintainer_email='drobot@example.com',
    description='Frontier selection for autonomous map exploration',
    license='MIT',
    extras_require={
        'test': ['pytest'],
    },
)
