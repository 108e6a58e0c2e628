"""Scenario spreadsheet to Selenium suite generator."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
