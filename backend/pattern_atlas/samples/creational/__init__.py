"""Creational pattern samples"""
