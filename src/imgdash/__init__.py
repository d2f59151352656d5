"""
imgdash - Image upload dashboard with Streamlit

A small web application for uploading and browsing images:
- Local login gate persisted across restarts
- Image storage in an Appwrite bucket
- Upload metadata in an Appwrite database collection
"""

__version__ = "0.1.0"
__author__ = "imgdash"
__description__ = "Image upload dashboard with Streamlit"
