"""Nagios check for Graylog2 clusters."""

__version__ = "1.0.0"
__author__ = "Robin Bourne, forked from Antonino Catinello work"
__license__ = "BSD"
__year__ = "2016"
