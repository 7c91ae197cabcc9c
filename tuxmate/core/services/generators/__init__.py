"""
Generators — produce install scripts and one-line commands.

``script`` renders full scripts through the package-manager adapters,
``command`` produces copy-paste one-liners, and ``shared`` holds the
bash runtime every script embeds.
"""
