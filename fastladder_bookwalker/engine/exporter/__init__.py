"""Exporter SPI and implementations."""

from .base import BaseExporter
from .dry_run_exporter import DryRunExporter
from .fastladder_exporter import FastladderExporter

__all__ = ["BaseExporter", "DryRunExporter", "FastladderExporter"]
