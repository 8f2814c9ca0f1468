"""
unipac - one front-end for yay, Flatpak and Snap.
"""
__version__ = '1.0.0'
