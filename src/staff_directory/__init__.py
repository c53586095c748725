"""Staff Directory package.

Organized by feature modules (branches, staff, admins, status, ...) with a thin
Flask controller layer over services that talk to the remote spreadsheet
script through repository interfaces.
"""
