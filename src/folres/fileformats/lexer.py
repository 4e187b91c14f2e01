from lark import Lark

statementlexer = Lark(r"""
    %import common.WS
    %ignore WS
    %ignore COMMENT

    stmt : [args] "|-" [args]
    args : exp ("," exp)*

    unifiable : [terms] "===" [terms]

    ?exp : or_exp

    ?or_exp : and_exp
            | or_exp "|" and_exp -> or_

    ?and_exp : im_exp
             | and_exp "&" im_exp -> and_

    ?im_exp : unary
            | im_exp "->" unary -> implies
            | im_exp "<-" unary -> implied_by
            | im_exp "<->" unary -> iff

    ?unary : "!" unary -> not_
           | quantified
           | "(" exp ")"
           | app "==" app -> equal
           | app "!=" app -> unequal
           | TRUE -> true
           | FALSE -> false
           | app

    quantified : QUANTIFIER NAME ("," NAME)* ":" exp

    app : NAME "(" [terms] ")" -> call
        | NAME -> symbol
        | ":" NAME -> free_var
    terms : app ("," app)*

    QUANTIFIER.2 : /(all|exists|some|no)\b/
    TRUE.2 : /(true|True)\b/
    FALSE.2 : /(false|False)\b/
    NAME : /[A-Za-z_][A-Za-z0-9_']*/
    COMMENT : /#[^\n]*/
""", start=["stmt", "exp", "unifiable"], parser="lalr")
