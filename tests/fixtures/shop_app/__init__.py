"""Sample application: a repository, a service and a report."""
