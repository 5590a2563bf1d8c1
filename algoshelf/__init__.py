"""Classic algorithms: sorting, searching, dynamic programming, greedy choice, graphs, backtracking, trees and number theory."""

__version__ = "0.1.0"