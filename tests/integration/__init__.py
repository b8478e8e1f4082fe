"""
Integration tests for the kodex CLI.

These tests run the real command handlers end-to-end:
- Real config composition from files in the working directory
- Real component loading and file generation under tmp_path
- A scripted choice provider in place of the terminal
"""
