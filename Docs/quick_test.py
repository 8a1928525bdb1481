from lexer import Lexer, format_token

lex = Lexer()
src = 'print a letter: ++++++++[>++++++++<-]>+.\nthen read one ,'
for tok in lex.tokenize_text(src):
    print(format_token(tok, "<demo>"))
