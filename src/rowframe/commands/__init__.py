"""Shell commands exposing rowframe functionalities.

This module contains the shell commands that can be used to interact with rowframe.

Describe
========

``rowframe-describe`` prints a summary of the content of a CSV or JSON file::

    rowframe-describe users.csv

It reports the shape of the table, the type of each column, the first rows
and the mean, median and standard deviation of every numeric column.
Rows can be sorted before being displayed::

    rowframe-describe users.json --sort Age --descending --head 10
"""
