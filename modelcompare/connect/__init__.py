"""Connectors: the port to the external connection layer."""
from modelcompare.connect.base import ModelConnector
from modelcompare.connect.bim_file import BimFileConnector

__all__ = ["BimFileConnector", "ModelConnector"]
