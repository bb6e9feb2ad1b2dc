"""Mototrack: fleet tracking REST backend for motos, filiais, usuarios, eventos and agendamentos."""

__version__ = "1.0.0"
