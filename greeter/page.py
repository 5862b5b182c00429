from __future__ import annotations

import html
from dataclasses import dataclass

from .utils import hostname, platform_id, runtime_version


@dataclass(frozen=True)
class HostInfo:
    hostname: str
    platform: str
    runtime: str

    @classmethod
    def detect(cls) -> "HostInfo":
        return cls(hostname=hostname(), platform=platform_id(), runtime=runtime_version())


PAGE_TEMPLATE = """
    <!DOCTYPE html>
    <html>
    <head>
      <title>EKS Ready</title>
      <style>
        body {{
          font-family: Arial, sans-serif;
          display: flex;
          justify-content: center;
          align-items: center;
          height: 100vh;
          margin: 0;
          background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
          color: white;
        }}
        .container {{
          text-align: center;
          padding: 2rem;
          background: rgba(255, 255, 255, 0.1);
          border-radius: 10px;
          backdrop-filter: blur(10px);
        }}
        h1 {{ margin: 0 0 1rem 0; font-size: 3rem; }}
        p {{ margin: 0.5rem 0; font-size: 1.2rem; }}
        .info {{ font-size: 0.9rem; opacity: 0.8; margin-top: 2rem; }}
      </style>
    </head>
    <body>
      <div class="container">
        <h1>\U0001F680 {message}</h1>
        <p>Hostname: {hostname}</p>
        <p>Platform: {platform}</p>
        <p>Runtime: {runtime}</p>
        <div class="info">
          <p>Powered by Amazon EKS</p>
          <p>From Senora.dev</p>
        </div>
      </div>
    </body>
    </html>
"""


def render_page(message: str, info: HostInfo) -> str:
    """Render the landing page shown on every non-health path."""
    return PAGE_TEMPLATE.format(
        message=html.escape(message),
        hostname=html.escape(info.hostname),
        platform=html.escape(info.platform),
        runtime=html.escape(info.runtime),
    )
