"""Large-number multiplication with the schoolbook and Karatsuba algorithms, plus benchmarking, CSV and HTML reports, and an interactive menu."""

__version__ = "0.1.0"