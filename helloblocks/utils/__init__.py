"""Chain hashing, logging and debugging helpers"""
