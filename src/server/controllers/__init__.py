"""Server controllers"""
