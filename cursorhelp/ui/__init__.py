"""Couche de présentation Tkinter."""
