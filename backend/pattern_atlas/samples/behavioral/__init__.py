"""Behavioral pattern samples"""
