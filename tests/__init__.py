"""pgdumpsplit tests"""
