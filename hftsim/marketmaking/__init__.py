"""Inventory-aware passive market maker running against a random-walk exchange."""