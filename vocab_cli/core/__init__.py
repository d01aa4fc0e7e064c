"""Core components: storage, message catalog and vocabulary operations"""
