"""Self-contained, runnable pattern samples"""
