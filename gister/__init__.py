"""gister - upload files to GitHub Gists from the command line."""
