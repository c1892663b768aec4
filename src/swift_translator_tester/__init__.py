"""Workbook-driven UI tester for a Singlish to Sinhala web translator."""
