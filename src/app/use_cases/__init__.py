"""
Use Cases

Organized into domain folders:
- auth/: Login and password reset
- games/: Game results and ranking counters
- rankings/: Ranking queries
- articles/: Quiz articles
- contact/: Contact form
- admin/: Maintenance operations
"""
