from setuptools import setup


setup(name='tetsphere',
      version='0.1.0',
      description='Monte Carlo probability that a random spherical tetrahedron contains the center',
      author='tetsphere contributors',
      license='MIT',
      packages=['tetsphere',
                'tetsphere.estimation',
                'tetsphere.visualization'],
      py_modules=['run_estimate'],
      install_requires=[
          'scipy',
          'numpy',
          'matplotlib',
          'pillow',
           ],
      extras_require={
          'test': ['pytest'],
      },
      long_description='None',
      long_description_content_type='text/markdown',
      keywords='monte-carlo geometry probability',
      classifiers=[
          # How mature is this project? Common values are
          #   3 - Alpha
          #   4 - Beta
          #   5 - Production/Stable
          'Development Status :: 3 - Alpha',

          'Intended Audience :: Science/Research',
          'Intended Audience :: Developers',
          'Topic :: Scientific/Engineering',
          'Topic :: Scientific/Engineering :: Mathematics',

          'License :: OSI Approved :: MIT License',

          'Programming Language :: Python :: 3.9',
      ],
      zip_safe=False)
