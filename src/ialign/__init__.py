"""
iAlign — resource and portfolio management.

Fiscal calendar primitives shared by the project, capacity and allocation
services.
"""
