"""Text front end for speech synthesis: Chinese numerals and normalisation,
English cleaning, phoneme id sequences, query records and configuration."""

__version__ = "0.1.0"