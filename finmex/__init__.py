"""finmex: real yield and credit cost calculator for Mexican debit and credit cards."""

__version__ = "0.1.0"
