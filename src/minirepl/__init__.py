'''
Two small interactive programs: a persistent todo list and an RPN
calculator.
'''
