from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def app_page():
    # Single-Page-App: Hash-Routing, Token liegt in localStorage
    return """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Blog</title>
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <link href="https://cdn.jsdelivr.net/npm/tailwindcss@2.2.19/dist/tailwind.min.css" rel="stylesheet">
  <style>
    .card { background:#fff; border-radius:16px; padding:20px; box-shadow:0 4px 16px rgba(0,0,0,.08); }
    .btn  { padding:.5rem 1rem; border-radius:10px; background:#2f6df6; color:#fff; font-weight:600; }
    .btn2 { padding:.5rem 1rem; border-radius:10px; background:#eef1f6; }
    .btnd { padding:.5rem 1rem; border-radius:10px; background:#e5484d; color:#fff; }
    input, textarea { width:100%; padding:.6rem .8rem; border:1px solid #d0d7e2; border-radius:10px; }
    button:disabled { opacity:.6; cursor:not-allowed; }
  </style>
</head>
<body class="bg-gray-50 min-h-screen">
  <nav class="bg-white shadow mb-6">
    <div class="max-w-5xl mx-auto px-4 py-3 flex items-center justify-between">
      <a href="#/" class="text-xl font-bold">Blog</a>
      <div id="nav" class="flex gap-3 items-center text-sm"></div>
    </div>
  </nav>
  <main id="view" class="max-w-5xl mx-auto px-4 pb-10"></main>

<script>
const view = document.getElementById('view');
const nav = document.getElementById('nav');

const auth = {
  get token(){ return localStorage.getItem('token'); },
  get user(){ try { return JSON.parse(localStorage.getItem('user')); } catch(e){ return null; } },
  set(user, token){ localStorage.setItem('user', JSON.stringify(user)); localStorage.setItem('token', token); },
  clear(){ localStorage.removeItem('user'); localStorage.removeItem('token'); }
};

function esc(s){
  return String(s ?? '').replace(/[&<>"']/g, c => ({'&':'&amp;','<':'&lt;','>':'&gt;','"':'&quot;',"'":'&#39;'}[c]));
}
function fmtDate(s){ return s ? new Date(s).toLocaleDateString() : ''; }

async function api(path, opts = {}){
  const headers = Object.assign({}, opts.headers || {});
  if (auth.token) headers['Authorization'] = 'Bearer ' + auth.token;
  if (opts.json !== undefined){
    headers['Content-Type'] = 'application/json';
    opts.body = JSON.stringify(opts.json);
  }
  const res = await fetch(path, { method: opts.method || 'GET', headers, body: opts.body });
  let data = null;
  try { data = await res.json(); } catch(e) {}
  if (!res.ok){
    if (res.status === 403 && data && data.message === 'Invalid token'){ auth.clear(); renderNav(); }
    throw new Error((data && data.message) || ('HTTP ' + res.status));
  }
  return data;
}

function renderNav(){
  const u = auth.user;
  nav.innerHTML = u
    ? `<a href="#/create" class="btn">New post</a><span class="text-gray-600">${esc(u.username)}</span><a href="#/logout" class="btn2">Logout</a>`
    : `<a href="#/login" class="btn2">Login</a><a href="#/register" class="btn">Register</a>`;
}

function loading(){ view.innerHTML = '<div class="text-center text-gray-500 py-10">Loading…</div>'; }
function errorBox(msg){ return `<div class="card text-red-600">${esc(msg)}</div>`; }

async function homeView(){
  loading();
  try {
    const posts = await api('/api/posts');
    if (!posts.length){
      view.innerHTML = `<div class="card text-center py-10"><h3 class="text-lg font-semibold">No posts yet</h3>
        <p class="text-gray-500">Be the first to share your thoughts!</p></div>`;
      return;
    }
    view.innerHTML = '<div class="grid gap-4 md:grid-cols-2">' + posts.map(p => `
      <div class="card">
        ${p.image ? `<img src="${esc(p.image)}" alt="${esc(p.title)}" class="w-full h-48 object-cover rounded-lg mb-3">` : ''}
        <h2 class="text-lg font-semibold">${esc(p.title)}</h2>
        <p class="text-gray-600 my-2">${esc(p.content.substring(0, 150))}${p.content.length > 150 ? '…' : ''}</p>
        <div class="flex justify-between text-sm text-gray-500">
          <span>${esc(p.author.username)} · ${fmtDate(p.createdAt)} · ${p.comments.length} comments</span>
          <a href="#/posts/${p.id}" class="text-blue-600">Read more</a>
        </div>
      </div>`).join('') + '</div>';
  } catch(e){ view.innerHTML = errorBox(e.message); }
}

function authForm(kind){
  const isReg = kind === 'register';
  view.innerHTML = `
    <form id="f" class="card max-w-md mx-auto space-y-3">
      <h1 class="text-xl font-semibold">${isReg ? 'Register' : 'Login'}</h1>
      ${isReg ? '<label class="block">Username<input name="username" required minlength="3" maxlength="30"></label>' : ''}
      <label class="block">Email<input name="email" type="email" required></label>
      <label class="block">Password<input name="password" type="password" required ${isReg ? 'minlength="6"' : ''}></label>
      <button class="btn w-full" id="b">${isReg ? 'Create account' : 'Login'}</button>
      <div id="msg" class="text-sm text-red-600"></div>
    </form>`;
  document.getElementById('f').addEventListener('submit', async (e) => {
    e.preventDefault();
    const fd = Object.fromEntries(new FormData(e.target));
    const b = document.getElementById('b'); b.disabled = true;
    try {
      if (isReg){
        await api('/api/auth/register', { method: 'POST', json: fd });
      }
      const res = await api('/api/auth/login', { method: 'POST', json: { email: fd.email, password: fd.password } });
      auth.set(res.user, res.token);
      location.hash = '#/';
    } catch(err){
      document.getElementById('msg').textContent = err.message;
    } finally { b.disabled = false; }
  });
}

async function postView(id){
  loading();
  let p;
  try { p = await api('/api/posts/' + id); } catch(e){ view.innerHTML = errorBox(e.message); return; }
  const u = auth.user;
  const owner = u && u.id === p.author.id;
  view.innerHTML = `
    <a href="#/" class="btn2 inline-block mb-4">Back to posts</a>
    <div class="card mb-4">
      <div class="flex justify-between items-start">
        <h1 class="text-2xl font-bold mb-2">${esc(p.title)}</h1>
        ${owner ? `<div class="flex gap-2"><a href="#/posts/${p.id}/edit" class="btn2">Edit</a><button id="del" class="btnd">Delete</button></div>` : ''}
      </div>
      <div class="text-sm text-gray-500 mb-3">${esc(p.author.username)} · ${fmtDate(p.createdAt)}${p.updatedAt !== p.createdAt ? ' · updated ' + fmtDate(p.updatedAt) : ''}</div>
      ${p.image ? `<img src="${esc(p.image)}" alt="${esc(p.title)}" class="w-full rounded-lg mb-3">` : ''}
      <div class="whitespace-pre-wrap">${esc(p.content)}</div>
    </div>
    <div class="card">
      <h2 class="text-lg font-semibold mb-3">Comments (${p.comments.length})</h2>
      ${u ? `<form id="cf" class="mb-4 space-y-2"><textarea name="content" rows="3" required placeholder="Write a comment…"></textarea>
             <button class="btn" id="cb">Post comment</button><div id="cmsg" class="text-sm text-red-600"></div></form>`
          : '<p class="text-gray-500 mb-4"><a href="#/login" class="text-blue-600">Login</a> to comment.</p>'}
      ${p.comments.length ? p.comments.map(c => `
        <div class="border-t py-2"><div class="text-sm text-gray-500">${esc(c.author.username)} · ${fmtDate(c.createdAt)}</div>
        <div class="whitespace-pre-wrap">${esc(c.content)}</div></div>`).join('') : '<p class="text-gray-500">No comments yet.</p>'}
    </div>`;
  const del = document.getElementById('del');
  if (del) del.addEventListener('click', async () => {
    if (!confirm('Are you sure you want to delete this post?')) return;
    try { await api('/api/posts/' + p.id, { method: 'DELETE' }); location.hash = '#/'; }
    catch(e){ alert(e.message); }
  });
  const cf = document.getElementById('cf');
  if (cf) cf.addEventListener('submit', async (e) => {
    e.preventDefault();
    const cb = document.getElementById('cb'); cb.disabled = true;
    try {
      await api('/api/posts/' + p.id + '/comments', { method: 'POST', json: { content: cf.elements['content'].value } });
      postView(p.id);
    } catch(err){ document.getElementById('cmsg').textContent = err.message; cb.disabled = false; }
  });
}

async function uploadImage(file){
  const fd = new FormData();
  fd.append('image', file);
  const res = await api('/api/upload', { method: 'POST', body: fd });
  return res.imageUrl;
}

async function editorView(id){
  if (!auth.user){ location.hash = '#/login'; return; }
  let post = { title: '', content: '', image: null };
  if (id){
    loading();
    try { post = await api('/api/posts/' + id); } catch(e){ view.innerHTML = errorBox(e.message); return; }
    if (post.author.id !== auth.user.id){ view.innerHTML = errorBox('You can only edit your own posts'); return; }
  }
  view.innerHTML = `
    <form id="pf" class="card max-w-2xl mx-auto space-y-3">
      <h1 class="text-xl font-semibold">${id ? 'Edit post' : 'Create post'}</h1>
      <label class="block">Title<input name="title" maxlength="200" required value="${esc(post.title)}"></label>
      <label class="block">Content<textarea name="content" rows="10" required>${esc(post.content)}</textarea></label>
      <label class="block">Image<input name="image" type="file" accept="image/*"></label>
      ${post.image ? `<img src="${esc(post.image)}" class="h-32 rounded-lg" alt="current image">` : ''}
      <div class="flex gap-2"><button class="btn" id="sb">${id ? 'Update' : 'Publish'}</button>
        <a href="${id ? '#/posts/' + id : '#/'}" class="btn2">Cancel</a></div>
      <div id="pmsg" class="text-sm text-red-600"></div>
    </form>`;
  const pf = document.getElementById('pf');
  pf.addEventListener('submit', async (e) => {
    e.preventDefault();
    const sb = document.getElementById('sb'); sb.disabled = true;
    const msg = document.getElementById('pmsg'); msg.textContent = '';
    try {
      let image = post.image;
      const file = pf.elements['image'].files[0];
      if (file){
        if (!file.type.startsWith('image/')) throw new Error('Please select a valid image file');
        if (file.size > 5 * 1024 * 1024) throw new Error('Image size should be less than 5MB');
        sb.textContent = 'Uploading image…';
        image = await uploadImage(file);
      }
      const body = { title: pf.elements['title'].value, content: pf.elements['content'].value, image };
      const saved = id
        ? await api('/api/posts/' + id, { method: 'PUT', json: body })
        : await api('/api/posts', { method: 'POST', json: body });
      location.hash = '#/posts/' + saved.id;
    } catch(err){
      msg.textContent = err.message;
      sb.disabled = false; sb.textContent = id ? 'Update' : 'Publish';
    }
  });
}

function route(){
  renderNav();
  const parts = (location.hash.replace(/^#\\/?/, '') || '').split('/').filter(Boolean);
  if (!parts.length) return homeView();
  if (parts[0] === 'login') return authForm('login');
  if (parts[0] === 'register') return authForm('register');
  if (parts[0] === 'logout'){ auth.clear(); location.hash = '#/'; return; }
  if (parts[0] === 'create') return editorView(null);
  if (parts[0] === 'posts' && parts[1] && parts[2] === 'edit') return editorView(parts[1]);
  if (parts[0] === 'posts' && parts[1]) return postView(parts[1]);
  view.innerHTML = errorBox('Page not found');
}

window.addEventListener('hashchange', route);
route();
</script>
</body>
</html>
    """
