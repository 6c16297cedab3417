"""
Network access for scanning.

- http.py  - shared ``requests`` session with retry and default timeout
- pages.py - download one gallery page as text
"""
