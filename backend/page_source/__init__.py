"""
Page source package.
Loads pages from URLs or files and runs analyze requests.
"""
