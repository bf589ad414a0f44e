from setuptools import setup


setup(name="seqalign",
      version="0.1",
      description=("Edit distances and edit scripts over arbitrary sequences "
                   "with configurable edit operations"),
      license="Apache License 2.0",
      packages=["seqalign"],
      test_suite="seqalign",
      install_requires=[
          "editdistance>=0.5.2",
          "numpy>=1.19.2",
          "progressbar2>=3.0",
      ],
      python_requires=">=3.7",
      )
