#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Test package for pathfinder."""

import os
import sys

# Project root on sys.path so `pytest tests/` works without an install
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import matplotlib
matplotlib.use("Agg")
