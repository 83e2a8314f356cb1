"""Supported account currencies."""

USD = "USD"
EUR = "EUR"
TWD = "TWD"

SUPPORTED_CURRENCIES = (USD, EUR, TWD)


def is_supported_currency(currency: str) -> bool:
    return currency in SUPPORTED_CURRENCIES
