"""Paygate: Paystack payment-integration backend."""
