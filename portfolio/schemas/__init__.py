"""Write-path payload schemas.

Every admin entity form validates its draft against one of these models before
the content API is called.
"""
