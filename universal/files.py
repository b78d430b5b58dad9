import os

def char_replace(instr):
	for char in ['(', ')', '[', ']', ',', '/', "'", ":", ";", "&", ".", "#", "’"]:
		instr = instr.replace(char, '')
	instr = instr.strip()
	instr = instr.replace(' ', '_')
	return instr.lower()

def makedirs(output, game_obj, source=None):
	parts = [output, char_replace(game_obj)]
	if source:
		parts.append(char_replace(source))
	game_obj_dir = os.path.abspath(os.path.join(*parts))
	if not os.path.exists(game_obj_dir):
		os.makedirs(game_obj_dir)
	return game_obj_dir
