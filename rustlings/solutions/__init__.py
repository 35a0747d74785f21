"""Worked solutions to the exercises on traits, pointers, errors, iterators, quizzes, maps, structs and basics."""