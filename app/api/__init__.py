# app/api/__init__.py
