"""Reviews app package.

Star ratings with text left by users for spots. The average rating shown
on spots is derived from these rows at read time.
"""
