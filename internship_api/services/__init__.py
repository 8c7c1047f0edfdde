"""
Services module - blob storage, language analysis and recommendation clients.
"""
