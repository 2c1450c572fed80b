"""Structural pattern samples"""
