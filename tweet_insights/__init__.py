"""Batch tweet analysis with S3, Lambda and Amazon Comprehend."""

__version__ = "0.1.0"
