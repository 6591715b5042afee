"""Core conversion machinery: unit registry, engine, formatting and errors"""
