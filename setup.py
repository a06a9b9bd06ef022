from setuptools import setup, find_packages

setup(
    name="pq_basics",
    version="0.1.0",
    description="Priority queue backed by an array-based binary max-heap",
    packages=find_packages(include=["pq_basics", "pq_basics.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": [
            "numpy",
            "psutil",
            "pytest",
        ],
    },
    zip_safe=False,
)
