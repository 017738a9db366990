"""Parking System package.

Organized by feature modules (parking, payment, client) with a thin Flask
controller layer over service/repository layers and a key-value store.
"""
