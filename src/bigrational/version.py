# -*- coding: utf-8 -*-
"""Version information for package 'bigrational'."""

version = '0.1.0'
version_tuple = (0, 1, 0)
