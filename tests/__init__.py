"""
Test Suite for Bookshelf API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: Tests for /books endpoints
- test_book_service.py: Tests for the books service layer
- test_errors.py: Tests for error bodies and validation messages
- test_config.py: Tests for settings validation
- test_app.py: Tests for the app factory, health check and error handlers

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
