"""Team todo & attendance package.

Organized by feature modules (attendance, todos, dashboard) with pure rule
modules, thin service layers over repository protocols and a Flask controller
per feature.
"""
