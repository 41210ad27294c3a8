"""RankPath MCP Server.

Ask your AI about your sites' SEO — projects, crawl results, GEO analysis and
open issues, straight from the RankPath API.
Run: rankpath-mcp
"""

__version__ = "0.1.0"
