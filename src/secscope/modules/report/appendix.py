"""Fixed appendix text attached to every report."""

METHODOLOGY = """This vulnerability assessment was conducted using automated scanning techniques combined with manual verification.
The assessment included:
1. Network port scanning and service enumeration
2. Vulnerability database lookup and correlation
3. Payload testing and exploitation verification
4. Risk assessment and impact analysis

The assessment utilized various public vulnerability databases including CVE, Exploit-DB, and OWASP resources."""

REFERENCES: tuple[str, ...] = (
    "Common Vulnerabilities and Exposures (CVE) - https://cve.mitre.org/",
    "Exploit Database - https://www.exploit-db.com/",
    "OWASP Top 10 - https://owasp.org/www-project-top-ten/",
    "NIST Cybersecurity Framework - https://www.nist.gov/cyberframework",
    "SANS Top 25 Software Errors - https://www.sans.org/top25-software-errors/",
)

DISCLAIMER = """This vulnerability assessment report is provided for security testing purposes only.
The findings and recommendations in this report are based on automated scanning and may contain false positives.
Manual verification is recommended before taking remediation actions.
This assessment should be part of a comprehensive security program and not relied upon as the sole security measure."""
