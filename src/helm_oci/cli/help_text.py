"""Static usage text for the plugin."""

from helm_oci.version import __version__

LIST_USAGE = "Usage: helm oci list <registry> [--username <username>] [--password <password>]"
SEARCH_USAGE = (
    "Usage: helm oci search <registry> [pattern] [--username <username>] [--password <password>]"
)
INSPECT_USAGE = (
    "Usage: helm oci inspect <chart-ref> [--username <username>] [--password <password>]\n"
    "Example: helm oci inspect registry.example.com/mychart:1.0.0"
)

USAGE_TEXT = f"""\
Helm OCI Plugin v{__version__}

This plugin provides OCI registry operations for Helm charts using Google crane.

USAGE:
  helm oci <command> [arguments...]

COMMANDS:
  list <registry> [--username <username>] [--password <password>]
    List all repositories in the specified OCI registry

  search <registry> [pattern] [--username <username>] [--password <password>]
    Search for Helm charts in the specified OCI registry. If registry contains a path
    (registry/repo), shows tags for that specific repository. Otherwise, lists all
    repositories optionally filtered by pattern.

  inspect <chart-ref> [--username <username>] [--password <password>]
    Show the manifest of a chart

  help
    Show this help message

ARGUMENTS:
  registry    The OCI registry host (e.g., registry.example.com) or full
              registry/repository path (e.g., registry.example.com/repo/chart)
  pattern     Optional regex pattern to filter repository names when searching all
              repositories (not used when searching a specific repository)
  username    Optional username for registry authentication
  password    Optional password for registry authentication

  Credentials are only passed to crane when both username and password are given.

EXAMPLES:
  # List all repositories in a registry
  helm oci list registry.example.com

  # List repositories with authentication
  helm oci list registry.example.com --username myuser --password mypass

  # Search for charts containing 'nginx'
  helm oci search registry.example.com nginx

  # Show tags of one repository
  helm oci search registry.example.com/charts/nginx

  # Inspect a chart
  helm oci inspect registry.example.com/charts/nginx:1.0.0

ENVIRONMENT:
  HELM_OCI_DEBUG=true       Enable debug logging
  HELM_OCI_NO_COLOR=true    Disable colored status output (NO_COLOR is honored too)

INSTALLATION:
  helm plugin install https://github.com/your-org/helm-oci-plugin
  helm plugin update oci

DEPENDENCIES:
  This plugin automatically installs the Google crane binary for registry operations."""
